from fractions import Fraction
import ratinterp as ri

xs = [1, 2, 3, 4]
ys = [1, 3, 5, 10]
coeffs = ri.interpolate(xs, ys)
print(ri.format_vector(coeffs))
print(ri.format_polynomial(coeffs))
print([ri.evaluate(coeffs, x) for x in xs])
print(ri.evaluate(coeffs, Fraction(5, 2)))
# plot1 = ri.plot_polynomial(coeffs, xs=xs, ys=ys, x_range=(0, 5))

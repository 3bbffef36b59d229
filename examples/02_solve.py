import numpy as np
import ratinterp as ri

mat = ri.from_numpy(np.array([[1, 2, 3, 4], [4, 5, 6, 7], [7, 8, 9, 10]]))
rref = ri.solve(mat)
for row in rref:
    print(ri.format_vector(row))
print('rank', ri.rank(mat), 'pivots', ri.pivot_columns(mat))
print(ri.to_numpy(rref))

# square system with unique solution
system = ri.to_matrix([[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]])
sol = ri.solve(system)
print('triangular', ri.is_triangular(sol), 'x =', ri.format_vector([row[-1] for row in sol]))

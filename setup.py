from setuptools import setup, find_packages

setup(
    name="ratinterp",
    version="1.0",
    description="Exact rational polynomial interpolation and Gaussian elimination",
    long_description=("Polynomial interpolation and linear system solving over arbitrary-precision rationals, "
                      "with an interactive console for storing, printing and evaluating polynomials"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["ratinterp", "ratinterp.*"]),
    install_requires=["numpy", "scipy", "sympy", "matplotlib"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    entry_points={"console_scripts": ["ratinterp = ratinterp.console:main"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["interpolation", "rational", "gaussian elimination", "vandermonde"],
    zip_safe=False,
)

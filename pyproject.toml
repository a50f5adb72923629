[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipsum"
version = "0.1.0"
description = "Vectors, CSR and COO sparse matrices, vector kernels and Krylov solvers for numerical linear algebra"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "linear-algebra",
    "sparse",
    "csr",
    "coo",
    "blas",
    "krylov",
    "conjugate-gradient",
    "bicgstab",
    "gmres",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chipsum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

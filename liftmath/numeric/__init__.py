"""Numeric routines: common helpers, variables, calculus, matrices and linear regression."""
from .operators import add, sub, mul, div, pow
from .operators import addf, subf, mulf, powf, powi
from .operators import neg, recip

from .unary import exp, ln, sin, cos, tan, sinh, cosh, tanh

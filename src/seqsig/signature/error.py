# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors of the `signature` subpackage.
"""

__name__ = "seqsig.signature"
__author__ = "The Seqsig contributors"
__all__ = [
    "SignatureError",
    "DimensionMismatchError",
    "WeightKeyLengthError",
    "UnknownSymbolError",
    "LengthMismatchError",
    "TypeMismatchError",
    "UnmatchedWeightWarning",
]


class SignatureError(Exception):
    """
    Base class of all errors raised while computing a sequence
    signature.
    """

    pass


class DimensionMismatchError(SignatureError, ValueError):
    """
    Indicates that the vectors of a symbol mapping do not have the
    same dimension.
    """

    pass


class WeightKeyLengthError(SignatureError, ValueError):
    """
    Indicates that the window size cannot be inferred, because the
    contexts of a weight table have different lengths.
    """

    pass


class UnknownSymbolError(SignatureError, KeyError):
    """
    Indicates that a sequence contains a symbol, that is not part of
    the symbol mapping.
    """

    def __str__(self):
        # 'KeyError' would show the message in quotes
        return str(self.args[0]) if self.args else ""


class LengthMismatchError(SignatureError, ValueError):
    """
    Indicates that coordinate series have different lengths or that a
    local pattern does not have one element per neighbor.
    """

    pass


class TypeMismatchError(SignatureError, TypeError):
    """
    Indicates that a value has an unsuitable type, e.g. a fractional
    pixel coordinate or a non-boolean pattern element.
    """

    pass


class UnmatchedWeightWarning(Warning):
    """
    Indicates that no context in the weight table has the length of
    the window, so that weights can only be applied at the start of a
    sequence, if at all.
    """

    pass

# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for fetching sequence records and related data from
online databases.

The retrieved records are handled as plain text:
:mod:`seqsig.signature` only requires the sequence itself, as an
ordered collection of symbols, regardless of where it comes from.
"""

__name__ = "seqsig.database"
__author__ = "The Seqsig contributors"

from .error import *

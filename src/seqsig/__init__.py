# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Seqsig*.
The actual functionality for turning sequences into geometric
signatures resides in :mod:`seqsig.signature`, while
:mod:`seqsig.database` provides the retrieval of sequence records.
The top-level package itself only offers file utilities.
"""

__version__ = "0.3.0"
__name__ = "seqsig"
__author__ = "The Seqsig contributors"

from .file import *

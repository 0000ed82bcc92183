# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for downloading sequence records and taxonomy
information from the NCBI Entrez database.

NCBI limits the number of requests per second.
Hence, functions that send multiple requests wait between them.
Setting an API key via :func:`set_api_key()` raises the limit.
"""

__name__ = "seqsig.database.entrez"
__author__ = "The Seqsig contributors"

from .check import *
from .download import *
from .key import *
from .taxonomy import *

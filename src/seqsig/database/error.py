# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqsig.database"
__author__ = "The Seqsig contributors"
__all__ = ["RequestError"]


class RequestError(Exception):
    """
    Indicates that the database returned a response with an error
    message or other malformed content.
    """

    pass

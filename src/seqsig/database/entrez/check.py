# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqsig.database.entrez"
__author__ = "The Seqsig contributors"
__all__ = ["check_for_errors", "check_response"]

import json
from seqsig.database.error import RequestError

# Common error messages of the E-utilities
_error_messages = [
    "Error reading from remote server",
    "Bad gateway",
    "Bad Gateway",
    "Cannot process ID list",
    "server is temporarily unable to service your request",
    "Service unavailable",
    "Server Error",
    "ID list is empty",
    "Supplied id parameter is empty",
    "Resource temporarily unavailable",
    "Failed to retrieve sequence",
    "Failed to understand id",
]


def check_for_errors(message):
    """
    Check for common error messages in NCBI Entrez database responses.

    Parameters
    ----------
    message : str
        The message received from NCBI Entrez.

    Raises
    ------
    RequestError
        If the message contains an error message.

    Examples
    --------

    >>> check_for_errors("LOCUS       NC_012920")
    >>> try:
    ...     check_for_errors('{"error":"API rate limit exceeded"}')
    ... except RequestError as e:
    ...     print(e)
    API rate limit exceeded
    """
    # Server can respond short JSON error messages
    if len(message) < 500:
        try:
            message_json = json.loads(message)
        except json.decoder.JSONDecodeError:
            # It is not a JSON message
            message_json = None
        if isinstance(message_json, dict) and "error" in message_json:
            raise RequestError(message_json["error"])

    # Error always appear at the end of message
    message_end = message[-200:]
    # Seemingly arbitrary '+' characters are in NCBI error messages,
    # often whitespace is also replaced by '+'
    message_end = message_end.replace("+", "").replace(" ", "")
    for error_msg in _error_messages:
        if error_msg.replace(" ", "") in message_end:
            raise RequestError(error_msg)
    if message.startswith(" Error"):
        raise RequestError(message[8:])


def check_response(response):
    """
    Check a response of the E-utilities for errors.

    Parameters
    ----------
    response : requests.Response
        The response.

    Returns
    -------
    content : str
        The text content of the response.

    Raises
    ------
    RequestError
        If the server responded with an error status code or an error
        message.
    """
    content = response.text
    check_for_errors(content)
    if response.status_code != 200:
        raise RequestError(f"Error {response.status_code}: {content[:200]}")
    return content

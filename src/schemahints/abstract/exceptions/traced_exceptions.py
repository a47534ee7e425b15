"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2025-07-11
Updated: 2026-10-19
Description: Base class and functions to ease exception tracing in a string. Traced exceptions
            can carry structured details (kind names, member names, ...) that are rendered
            below the traceback.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"


import traceback
from typing import Any


def format_exception(e: BaseException) -> str:
    """Format the provided exception to a string with its traceback.

    Args:
        e (BaseException): The exception to format.

    Returns:
        str: The string representation of the exception with its traceback.
    """
    return "".join(traceback.format_exception(type(e), e, e.__traceback__))


def format_details(details: dict[str, Any]) -> str:
    """Format structured exception details, one `key: value` per line, sorted by key.

    Args:
        details (dict[str, Any]): The details to format.

    Returns:
        str: The formatted details or an empty string when there are none.
    """
    return "\n".join(f"  {key}: {details[key]!r}" for key in sorted(details))


class TracedException(Exception):
    """Base traceable exception class.

    Keyword arguments given at construction are kept as structured details:
        >>> e = TracedException("Bad kind.", kind="pkg.Range", slot="range")
        >>> e.details
        {'kind': 'pkg.Range', 'slot': 'range'}
    """

    def __init__(self, *args: Any, **details: Any) -> None:
        super().__init__(*args)
        self.details: dict[str, Any] = details

    def traceback_format(self) -> str:
        """Format the exception to a string with its traceback, followed by its details.

        Returns:
            str: The string representation of the exception with its traceback.
        """
        formatted = format_exception(self)
        if not self.details:
            return formatted
        return f"{formatted}Details:\n{format_details(self.details)}\n"

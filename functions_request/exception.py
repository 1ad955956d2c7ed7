# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exceptions raised by request building, encoding and the authorized senders list.

There are three families of errors, none of them is recovered internally:

- InvalidInputError: the caller gave an empty or invalid argument. It is raised before anything is changed, so the
  request (or the senders list) is exactly as it was before the call.
- InvariantViolation: the state cannot be encoded as it is, which points to a programming error (for instance a request
  whose fields were changed without the builder).
- PermissionDenied: the caller is not allowed to do what it asked for.
"""


class FunctionsError(Exception):
    """Base class for exceptions in functions_request."""
    pass


class InvalidInputError(FunctionsError):
    pass


class InvariantViolation(FunctionsError):
    pass


class PermissionDenied(FunctionsError):
    pass


class EmptySource(InvalidInputError):
    """Raised when the request source is empty."""


class EmptySecrets(InvalidInputError):
    """Raised when trying to attach an empty secrets blob."""


class EmptyArgs(InvalidInputError):
    """Raised when trying to attach an empty list of arguments."""


class EmptySendersList(InvalidInputError):
    """Raised when trying to replace the authorized senders with an empty list."""


class NoInlineSecrets(InvariantViolation):
    """Raised when encoding a request that carries secrets with an inline location."""


class RequestTooLarge(InvariantViolation):
    """Raised when the encoded request would exceed the configured maximum size."""


class UnauthorizedSender(PermissionDenied):
    """Raised when a sender that is not in the authorized list uses a protected action."""


class NotAllowedToSetSenders(PermissionDenied):
    """Raised when the caller is not allowed to change the authorized senders."""

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

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable

from structlog import get_logger

from functions_request.exception import EmptySendersList, NotAllowedToSetSenders, UnauthorizedSender
from functions_request.types import Address

logger = get_logger()


@dataclass(frozen=True)
class AuthorizedSendersChanged:
    """Emitted once every time the whole set of authorized senders is replaced."""
    senders: tuple[Address, ...]
    changed_by: Address


# Decides whether the given caller may replace the authorized senders.
CanSetSendersPredicate = Callable[[Address], bool]

OnChangeCallbackType = Callable[[AuthorizedSendersChanged], None] | None


class AuthorizedSenders:
    """Set of addresses allowed to use protected actions.

    Membership is kept in a set, the order in which the senders were last set is kept in a list next to it. Both are
    always replaced together.
    """

    def __init__(self, can_set_senders: CanSetSendersPredicate, *, on_change: OnChangeCallbackType = None) -> None:
        self.log = logger.new()
        self._can_set_senders = can_set_senders
        self._on_change_callback = on_change
        self._current: set[Address] = set()
        self._ordered: list[Address] = []

    def set_authorized_senders(self, senders: Iterable[Address], *, caller: Address) -> None:
        """Replace all authorized senders, repeated addresses only count once."""
        if not self._can_set_senders(caller):
            raise NotAllowedToSetSenders(f'{caller.hex()} cannot set the authorized senders')

        new_ordered = list(dict.fromkeys(senders))
        if not new_ordered:
            raise EmptySendersList('senders list cannot be empty')

        new_current = set(new_ordered)
        self._log_diff(self._current, new_current, caller)

        self._current.clear()
        self._ordered.clear()
        self._current.update(new_current)
        self._ordered.extend(new_ordered)

        if self._on_change_callback:
            self._on_change_callback(AuthorizedSendersChanged(senders=tuple(new_ordered), changed_by=caller))

    def get_authorized_senders(self) -> list[Address]:
        """ Returns the current senders, in the order they were last set."""
        return list(self._ordered)

    def is_authorized_sender(self, sender: Address) -> bool:
        return sender in self._current

    def validate_authorized_sender(self, sender: Address) -> None:
        """Raise UnauthorizedSender unless `sender` is authorized, protected actions call this before anything else."""
        if not self.is_authorized_sender(sender):
            raise UnauthorizedSender(f'{sender.hex()} is not an authorized sender')

    def _log_diff(self, current: set[Address], new: set[Address], caller: Address) -> None:
        to_add = new - current
        to_remove = current - new
        self.log.info(
            'authorized senders changed',
            changed_by=caller.hex(),
            added=sorted(sender.hex() for sender in to_add),
            removed=sorted(sender.hex() for sender in to_remove),
        )

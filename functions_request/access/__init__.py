from .authorized_senders import (
    AuthorizedSenders,
    AuthorizedSendersChanged,
    CanSetSendersPredicate,
    OnChangeCallbackType,
)
from .parsing import parse_address, parse_senders

__all__ = [
    'AuthorizedSenders',
    'AuthorizedSendersChanged',
    'CanSetSendersPredicate',
    'OnChangeCallbackType',
    'parse_address',
    'parse_senders',
]

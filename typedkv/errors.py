"""Exceptions raised by the TypedKV storage layer."""


class TypedKVError(Exception):
    """Base class for all TypedKV errors."""


class ValueEncodeError(TypedKVError):
    """A native value cannot be represented in its type's canonical encoding."""


class ValueDecodeError(TypedKVError):
    """A stored payload cannot be decoded under its own type tag."""

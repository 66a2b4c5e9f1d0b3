"""Exception taxonomy for the expander pipeline.

Soft failures (``MessageNotFound``) mean "nothing to expand" and are
swallowed by the pipeline. Hard failures (``ExpansionFailed``) abort the
current message and get logged by the dispatcher. ``StreamClosed`` ends the
event loop.
"""


class ExpanderError(Exception):
    """Base class for all msg_expander errors"""
    pass


class ConfigError(ExpanderError):
    """Raised when required configuration is missing or invalid"""
    pass


class StreamClosed(ExpanderError):
    """Raised by an event stream once the gateway session is gone for good"""
    pass


class RemoteLookupError(ExpanderError):
    """A single remote fetch failed (HTTP error, forbidden, network)"""
    pass


class RemoteNotFound(RemoteLookupError):
    """The remote API answered 404 for the requested entity"""
    pass


class MessageNotFound(ExpanderError):
    """The linked message or its channel could not be located"""

    def __init__(self, channel_id: int, message_id: int, reason: str = "not found"):
        self.channel_id = channel_id
        self.message_id = message_id
        self.reason = reason
        super().__init__(f"message {message_id} in channel {channel_id}: {reason}")


class ExpansionFailed(ExpanderError):
    """Base for hard pipeline failures"""
    pass


class AuthorUnavailable(ExpansionFailed):
    pass


class MissingAvatar(ExpansionFailed):
    pass


class TimestampOutOfRange(ExpansionFailed):
    pass


class PostFailed(ExpansionFailed):
    pass

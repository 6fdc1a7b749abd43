# What it does: Defines the failures the object reader can raise, so commands can report each kind with one `fatal:` line
# What data structure it uses: A small class hierarchy rooted at PeekError

class PeekError(Exception):
    pass


class NotARepository(PeekError): # No git directory could be located
    pass


class RefNotFound(PeekError): # A branch file or HEAD is missing
    pass


class ObjectNotFound(PeekError): # The loose object file for an id does not exist or cannot be opened
    def __init__(self, object_id, path=None):
        self.object_id = object_id
        self.path = path
        super().__init__(f"object not found: {object_id}")


class CorruptObject(PeekError): # The object file did not inflate to anything usable
    def __init__(self, object_id, reason):
        self.object_id = object_id
        self.reason = reason
        super().__init__(f"corrupt object {object_id}: {reason}")


class MalformedObject(PeekError): # Inflated bytes do not have the shape the declared type requires
    pass


class ConfigError(PeekError): # The config file holds an unknown key or a value of the wrong type
    pass


class InvalidObjectName(PeekError): # The user typed something that is not a 40-character hex id
    pass

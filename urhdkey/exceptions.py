#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Exceptions
#

class URDecodeError(ValueError):
    # base for every failure when reading a registry item
    # - field is the name of the offending field, if known
    def __init__(self, msg, field=None):
        self.field = field
        self.msg = msg
        super().__init__(f'{field}: {msg}' if field else msg)

class MalformedCBORError(URDecodeError):
    # bytes are not CBOR, or top-level value is not a map
    pass

class MissingFieldError(URDecodeError):
    def __init__(self, field, item='crypto-hdkey'):
        super().__init__(f'required by {item} but missing', field)

class FieldTypeError(URDecodeError):
    # field present, but holds the wrong kind of value
    pass

class UnexpectedTagError(URDecodeError):
    def __init__(self, field, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f'expected CBOR tag {expected}, got {got}', field)

class NestedDecodeError(URDecodeError):
    # a collaborator (coin info, key path) could not decode its value
    def __init__(self, field, cause):
        self.cause = cause
        super().__init__(f'nested value failed: {cause}', field)

# EOF

from enum import Enum


class CallbackKind(Enum):
    TOKEN = "access_token"
    ERROR = "error"

    @property
    def prefix(self) -> str:
        return self.value


# Keys recognized in a token grant fragment
ACCESS_TOKEN = "access_token"
ID_TOKEN = "id_token"
EXPIRES_IN = "expires_in"
TOKEN_TYPE = "token_type"
STATE = "state"

# Keys recognized in an authorization error fragment
ERROR = "error"
ERROR_DESCRIPTION = "error_description"

PAIR_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="

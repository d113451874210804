"""Error codes shared by the package and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum, auto


class ErrorCode(IntEnum):
    """Numeric error codes, grouped by subsystem in blocks of one hundred."""

    NO_ERROR = 0
    FAILURE = 1

    INVALID_PARAMETER = auto()
    PARAMETER_OUT_OF_RANGE = auto()

    BAD_CRC = auto()
    BAD_BLOCK = auto()
    INVALID_RECIPIENT = auto()
    INVALID_INTERFACE = auto()
    INVALID_ENDPOINT = auto()
    INVALID_ALT_SETTING = auto()
    UNSUPPORTED_REQUEST = auto()
    UNSUPPORTED_CONFIGURATION = auto()
    UNSUPPORTED_FEATURE = auto()
    ENDPOINT_BUSY = auto()
    USB_RESET = auto()
    ABORTED = auto()

    OUT_OF_MEMORY = 100
    OUT_OF_RESOURCES = auto()
    INVALID_REQUEST = auto()
    NOT_IMPLEMENTED = auto()
    VERSION_NOT_SUPPORTED = auto()
    INVALID_SYNTAX = auto()
    AUTHENTICATION_FAILED = auto()
    UNEXPECTED_RESPONSE = auto()
    INVALID_RESPONSE = auto()
    UNEXPECTED_VALUE = auto()
    WAIT_CANCELED = auto()

    OPEN_FAILED = 200
    CONNECTION_FAILED = auto()
    CONNECTION_REFUSED = auto()
    CONNECTION_CLOSING = auto()
    CONNECTION_RESET = auto()
    NOT_CONNECTED = auto()
    ALREADY_CLOSED = auto()
    ALREADY_CONNECTED = auto()
    INVALID_SOCKET = auto()
    PROTOCOL_UNREACHABLE = auto()
    PORT_UNREACHABLE = auto()
    INVALID_FRAME = auto()
    INVALID_HEADER = auto()
    WRONG_CHECKSUM = auto()
    WRONG_IDENTIFIER = auto()
    WRONG_CLIENT_ID = auto()
    WRONG_SERVER_ID = auto()
    WRONG_COOKIE = auto()
    NO_RESPONSE = auto()
    RECEIVE_QUEUE_FULL = auto()
    TIMEOUT = auto()
    WOULD_BLOCK = auto()
    INVALID_NAME = auto()
    INVALID_OPTION = auto()
    UNEXPECTED_STATE = auto()
    INVALID_COMMAND = auto()
    INVALID_PROTOCOL = auto()
    INVALID_STATUS = auto()
    INVALID_ADDRESS = auto()
    INVALID_PORT = auto()
    INVALID_MESSAGE = auto()
    INVALID_KEY = auto()
    INVALID_KEY_LENGTH = auto()
    INVALID_EPOCH = auto()
    INVALID_SEQUENCE_NUMBER = auto()
    INVALID_CHARACTER = auto()
    INVALID_LENGTH = auto()
    INVALID_PADDING = auto()
    INVALID_MAC = auto()
    INVALID_TAG = auto()
    INVALID_TYPE = auto()
    INVALID_VALUE = auto()
    INVALID_CLASS = auto()
    INVALID_VERSION = auto()
    INVALID_PIN_CODE = auto()
    WRONG_LENGTH = auto()
    WRONG_TYPE = auto()
    WRONG_ENCODING = auto()
    WRONG_VALUE = auto()
    INCONSISTENT_VALUE = auto()
    UNSUPPORTED_TYPE = auto()
    UNSUPPORTED_ALGO = auto()
    UNSUPPORTED_CIPHER_SUITE = auto()
    UNSUPPORTED_CIPHER_MODE = auto()
    UNSUPPORTED_CIPHER_ALGO = auto()
    UNSUPPORTED_HASH_ALGO = auto()
    UNSUPPORTED_KEY_EXCH_ALGO = auto()
    UNSUPPORTED_SIGNATURE_ALGO = auto()
    UNSUPPORTED_ELLIPTIC_CURVE = auto()
    INVALID_ELLIPTIC_CURVE = auto()
    INVALID_SIGNATURE_ALGO = auto()
    CERTIFICATE_REQUIRED = auto()
    MESSAGE_TOO_LONG = auto()
    OUT_OF_RANGE = auto()
    MESSAGE_DISCARDED = auto()

    INVALID_PACKET = auto()
    BUFFER_EMPTY = auto()
    BUFFER_OVERFLOW = auto()
    BUFFER_UNDERFLOW = auto()

    INVALID_RESOURCE = auto()
    INVALID_PATH = auto()
    NOT_FOUND = auto()
    ACCESS_DENIED = auto()
    NOT_WRITABLE = auto()
    AUTH_REQUIRED = auto()

    TRANSMITTER_BUSY = auto()
    NO_RUNNING = auto()

    INVALID_FILE = 300
    FILE_NOT_FOUND = auto()
    FILE_OPENING_FAILED = auto()
    FILE_READING_FAILED = auto()
    END_OF_FILE = auto()
    UNEXPECTED_END_OF_FILE = auto()
    UNKNOWN_FILE_FORMAT = auto()

    INVALID_DIRECTORY = auto()
    DIRECTORY_NOT_FOUND = auto()

    FILE_SYSTEM_NOT_SUPPORTED = 400
    UNKNOWN_FILE_SYSTEM = auto()
    INVALID_FILE_SYSTEM = auto()
    INVALID_BOOT_SECTOR_SIGNATURE = auto()
    INVALID_SECTOR_SIZE = auto()
    INVALID_CLUSTER_SIZE = auto()
    INVALID_FILE_RECORD_SIZE = auto()
    INVALID_INDEX_BUFFER_SIZE = auto()
    INVALID_VOLUME_DESCRIPTOR_SIGNATURE = auto()
    INVALID_VOLUME_DESCRIPTOR = auto()
    INVALID_FILE_RECORD = auto()
    INVALID_INDEX_BUFFER = auto()
    INVALID_DATA_RUNS = auto()
    WRONG_TAG_IDENTIFIER = auto()
    WRONG_TAG_CHECKSUM = auto()
    WRONG_MAGIC_NUMBER = auto()
    WRONG_SEQUENCE_NUMBER = auto()
    DESCRIPTOR_NOT_FOUND = auto()
    ATTRIBUTE_NOT_FOUND = auto()
    RESIDENT_ATTRIBUTE = auto()
    NOT_RESIDENT_ATTRIBUTE = auto()
    INVALID_SUPER_BLOCK = auto()
    INVALID_SUPER_BLOCK_SIGNATURE = auto()
    INVALID_BLOCK_SIZE = auto()
    UNSUPPORTED_REVISION_LEVEL = auto()
    INVALID_INODE_SIZE = auto()
    INODE_NOT_FOUND = auto()

    UNEXPECTED_MESSAGE = 500

    URL_TOO_LONG = auto()
    QUERY_STRING_TOO_LONG = auto()

    NO_ADDRESS = auto()
    NO_BINDING = auto()
    NOT_ON_LINK = auto()
    USE_MULTICAST = auto()
    NAK_RECEIVED = auto()
    EXCEPTION_RECEIVED = auto()

    NO_CARRIER = auto()

    INVALID_LEVEL = auto()
    WRONG_STATE = auto()
    END_OF_STREAM = auto()
    LINK_DOWN = auto()
    INVALID_OPTION_LENGTH = auto()
    IN_PROGRESS = auto()

    NO_ACK = auto()
    INVALID_METADATA = auto()
    NOT_CONFIGURED = auto()
    ALREADY_CONFIGURED = auto()
    NAME_RESOLUTION_FAILED = auto()
    NO_ROUTE = auto()

    WRITE_FAILED = auto()
    READ_FAILED = auto()
    UPLOAD_FAILED = auto()
    READ_ONLY_ACCESS = auto()

    INVALID_SIGNATURE = auto()
    INVALID_TICKET = auto()
    NO_TICKET = auto()

    BAD_RECORD_MAC = auto()
    RECORD_OVERFLOW = auto()
    HANDSHAKE_FAILED = auto()
    NO_CERTIFICATE = auto()
    BAD_CERTIFICATE = auto()
    UNSUPPORTED_CERTIFICATE = auto()
    UNKNOWN_CERTIFICATE = auto()
    CERTIFICATE_EXPIRED = auto()
    CERTIFICATE_REVOKED = auto()
    UNKNOWN_CA = auto()
    DECODING_FAILED = auto()
    DECRYPTION_FAILED = auto()
    ILLEGAL_PARAMETER = auto()
    MISSING_EXTENSION = auto()
    UNSUPPORTED_EXTENSION = auto()
    INAPPROPRIATE_FALLBACK = auto()
    NO_APPLICATION_PROTOCOL = auto()

    MORE_DATA_REQUIRED = auto()
    TLS_NOT_SUPPORTED = auto()
    PRNG_NOT_READY = auto()
    SERVICE_CLOSING = auto()
    INVALID_TIMESTAMP = auto()
    NO_DNS_SERVER = auto()

    OBJECT_NOT_FOUND = auto()
    INSTANCE_NOT_FOUND = auto()
    ADDRESS_NOT_FOUND = auto()

    UNKNOWN_IDENTITY = auto()
    UNKNOWN_ENGINE_ID = auto()
    UNKNOWN_USER_NAME = auto()
    UNKNOWN_CONTEXT = auto()
    UNAVAILABLE_CONTEXT = auto()
    UNSUPPORTED_SECURITY_LEVEL = auto()
    NOT_IN_TIME_WINDOW = auto()
    AUTHORIZATION_FAILED = auto()

    INVALID_FUNCTION_CODE = auto()
    DEVICE_BUSY = auto()

    REQUEST_REJECTED = auto()

    INVALID_CHANNEL = auto()
    INVALID_GROUP = auto()
    UNKNOWN_SERVICE = auto()
    UNKNOWN_REQUEST = auto()
    FLOW_CONTROL = auto()

    INVALID_PASSWORD = auto()
    INVALID_HANDLE = auto()
    BAD_NONCE = auto()
    UNEXPECTED_STATUS = auto()
    RESPONSE_TOO_LARGE = auto()

    INVALID_SESSION = auto()
    TICKET_EXPIRED = auto()

    INVALID_ENTRY = auto()
    TABLE_FULL = auto()
    END_OF_TABLE = auto()

    ALREADY_RUNNING = auto()
    UNKNOWN_KEY = auto()
    UNKNOWN_TYPE = auto()
    UNSUPPORTED_OPTION = auto()
    INVALID_SPI = auto()
    RETRY = auto()
    POLICY_FAILURE = auto()
    INVALID_PROPOSAL = auto()
    INVALID_SELECTOR = auto()

    WRONG_NONCE = auto()
    WRONG_ISSUER = auto()
    RESPONSE_EXPIRED = auto()
    CRL_EXPIRED = auto()

    INVALID_CSR = auto()
    REQUEST_PENDING = auto()

    RESEED_REQUIRED = auto()

    NO_MATCH = auto()
    PARTIAL_MATCH = auto()


class PortError(Exception):
    """An error that carries one of the codes in :class:`ErrorCode`."""

    def __init__(self, code, message=None):
        self.code = ErrorCode(code)
        self.message = message or self.code.name.replace("_", " ").lower()
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"PortError({self.code.name}, {self.message!r})"
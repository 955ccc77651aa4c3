"""
Exceptions for KingUtils
Everything raised on purpose by the library derives from KingUtilsError
"""


class KingUtilsError(Exception):
    # general container for errors
    pass


class InitializationError(KingUtilsError):
    # raised when configuration cannot be loaded (bad env values etc.)
    pass


class InvalidSymbolError(KingUtilsError, ValueError):
    # raised when decoding meets a character outside the codec alphabet

    def __init__(self, symbol: str, alphabet: str):
        self.symbol = symbol
        self.alphabet = alphabet
        super().__init__(
            f"Invalid character {symbol!r} in input string. "
            f"Only characters from the alphabet {alphabet!r} are allowed."
        )


class MalformedEnvelopeError(KingUtilsError, ValueError):
    # raised when an envelope string cannot be split/decoded into its fields
    pass


class UnsupportedAlgorithmError(KingUtilsError):
    # raised for hash algorithm tags outside the table or missing from the backend
    pass


class DecryptionFailedError(KingUtilsError):
    # wrong password and corrupted ciphertext both end up here
    pass

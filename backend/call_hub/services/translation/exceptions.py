"""
Translation Service Exceptions

Custom exceptions for speech translation errors.
"""


class TranslationServiceError(Exception):
    """Base exception for translation service errors"""
    pass


class TranscriptionError(TranslationServiceError):
    """Raised when speech-to-text fails or returns no text"""
    pass


class TextTranslationError(TranslationServiceError):
    """Raised when text translation fails or returns no text"""
    pass


class TranslationConfigError(TranslationServiceError):
    """Raised at startup when the configured provider cannot be used"""
    pass

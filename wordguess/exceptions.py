"""
Game Errors

Every error carries a user-facing message and the HTTP status used when it
reaches a controller.
"""


class WordGuessError(Exception):
    """Base class for errors surfaced to players."""
    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidLength(WordGuessError):
    default_message = "Please enter a 5-letter word"


class GameOver(WordGuessError):
    default_message = "The game is over. Start a new game to play again."


class AttemptsExhausted(WordGuessError):
    default_message = "No attempts left"


class SubmissionPending(WordGuessError):
    status_code = 409
    default_message = "A guess is already being scored"


class ModeUnavailable(WordGuessError):
    default_message = "Remote mode is not configured"


class RemoteUnavailable(WordGuessError):
    status_code = 502
    default_message = "Scoring service unavailable"


class MalformedRequest(WordGuessError):
    default_message = "Invalid request body"


class GameNotFound(WordGuessError):
    status_code = 404
    default_message = "Game not found"

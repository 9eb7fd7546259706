"""
Exceptions raised by the challenge and ledger engine.

Every exception carries an internal message and a short user-facing message.
Business-rule rejections are raised before any state is touched.
"""


class HabitForgeError(Exception):
    """Base exception for engine errors."""

    code = "error"

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message


class ValidationError(HabitForgeError):
    """Raised when an input value is missing or out of range."""

    code = "validation"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}", reason)


class CapacityExceededError(HabitForgeError):
    """Raised when too many personal challenges are active."""

    code = "capacity_exceeded"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"Active challenge limit of {limit} reached",
            f"You can have at most {limit} active challenges.",
        )


class WindowExpiredError(HabitForgeError):
    """Raised when a challenge is removed after its deletion window."""

    code = "window_expired"

    def __init__(self, challenge_id: str, window_hours: int):
        self.challenge_id = challenge_id
        super().__init__(
            f"Challenge {challenge_id} is older than {window_hours}h",
            f"Challenges can only be deleted during the first {window_hours} hours.",
        )


class ChallengeNotFoundError(HabitForgeError):
    """Raised when a challenge id is unknown."""

    code = "not_found"

    def __init__(self, challenge_id: str):
        super().__init__(
            f"Challenge {challenge_id} not found",
            "Challenge not found.",
        )


class ParticipantNotFoundError(HabitForgeError):
    """Raised when a participant id is unknown."""

    code = "not_found"

    def __init__(self, participant_id: str):
        super().__init__(
            f"Participant {participant_id} not found",
            "Participant not found.",
        )


class GroupFullError(HabitForgeError):
    """Raised when the weekly roster is at capacity."""

    code = "full"

    def __init__(self, capacity: int):
        super().__init__(
            f"Group week is full ({capacity} participants)",
            "The weekly challenge is full.",
        )


class MissingNameError(HabitForgeError):
    """Raised when joining without a nickname or login name."""

    code = "missing_name"

    def __init__(self):
        super().__init__(
            "No nickname or login name to join with",
            "Enter a nickname to join.",
        )


class DuplicateNameError(HabitForgeError):
    """Raised when a nickname is already on the roster."""

    code = "duplicate_name"

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Participant name '{name}' already taken",
            "That nickname is already on the list.",
        )


class InsufficientFundsError(HabitForgeError):
    """Raised when a debit would make the balance negative."""

    code = "insufficient_funds"

    def __init__(self, amount: int, balance: int):
        self.amount = amount
        self.balance = balance
        super().__init__(
            f"Cannot debit {amount} from balance {balance}",
            f"Not enough balance: {amount} needed, {balance} available.",
        )


class NotJoinedError(HabitForgeError):
    """Raised when finalizing a week the user has not joined."""

    code = "not_joined"

    def __init__(self):
        super().__init__(
            "Cannot finalize without a self entry",
            "Join the weekly challenge first.",
        )


class WeekNotEndedError(HabitForgeError):
    """Raised when finalizing before the week is over."""

    code = "week_not_ended"

    def __init__(self, elapsed_days: int):
        self.elapsed_days = elapsed_days
        super().__init__(
            f"Week still running ({elapsed_days} days elapsed)",
            "The week has not ended yet.",
        )


class AuthenticationError(HabitForgeError):
    """Raised when login credentials are rejected."""

    code = "authentication"

    def __init__(self, reason: str):
        super().__init__(f"Authentication failed: {reason}", reason)


class LoginChangeCooldownError(HabitForgeError):
    """Raised when the login name was changed too recently."""

    code = "login_cooldown"

    def __init__(self, days_left: int):
        self.days_left = days_left
        super().__init__(
            f"Login change blocked for {days_left} more days",
            f"You can change your login again in {days_left} days.",
        )


class PersistenceError(HabitForgeError):
    """Raised when the durable store cannot be read or written."""

    code = "persistence"

    def __init__(self, operation: str, details: str = None):
        super().__init__(
            f"Store error during {operation}: {details}",
            "Could not save your data. It will be kept for this session.",
        )

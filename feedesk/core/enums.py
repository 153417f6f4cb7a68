from enum import Enum


class FeeFrequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"
    ONE_TIME = "one-time"


class FeeCategory(str, Enum):
    TUITION = "tuition"
    TRANSPORT = "transport"
    LIBRARY = "library"
    SPORTS = "sports"
    OTHER = "other"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    ONLINE = "online"
    CHECK = "check"


class PaymentStatus(str, Enum):
    completed = "completed"
    pending = "pending"
    failed = "failed"


class UserRole(str, Enum):
    ADMIN = "admin"

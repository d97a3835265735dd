# Import all models here so callers can use ``from tourney_store.models import User``
from .user_model import Role, User
from .tournament_model import Entry, MatchType, Tournament
from .payment_model import PaymentRequest, PaymentStatus, PaymentType
from .settings_model import AppSettings
from .message_model import ChatMessage
from .snapshot_model import StoreState

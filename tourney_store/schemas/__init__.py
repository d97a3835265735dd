from .auth_schemas import RegistrationRequest
from .result_schemas import OperationResult
from .user_schemas import AdminUserUpdate, ProfileUpdate

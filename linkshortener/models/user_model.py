from dataclasses import dataclass
from datetime import datetime


# fmt: off
@dataclass(frozen=True)
class UserModel:
    user_id: str            # UUID4 string, the only credential a user holds
    name: str               # Display name given at registration
    created_at: datetime    # Registration time (UTC)
# fmt: on

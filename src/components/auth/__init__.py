"""
Auth component - administrator login and session token issuance.
"""

from .component import run_login
from .models import LoginInput, LoginOutput
from .ports import CredentialHasherPort, TokenIssuerPort, UserLookupPort

__all__ = [
    # Entry points
    "run_login",
    # Models
    "LoginInput",
    "LoginOutput",
    # Ports
    "CredentialHasherPort",
    "TokenIssuerPort",
    "UserLookupPort",
]

from dataclasses import dataclass


@dataclass
class LoginInput:
    login_id: str
    password: str


@dataclass
class LoginOutput:
    token: str
    login_id: str
    role_tag: str

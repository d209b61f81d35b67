from pydantic import BaseModel

class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""

class Token(BaseModel):
    token: str
    token_type: str = "bearer"

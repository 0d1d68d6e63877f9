from ninja_jwt.authentication import JWTAuth

# Bearer token -> request.auth (User); token issuance lives in the ninja_jwt routers
class AuthBearer(JWTAuth):
    pass

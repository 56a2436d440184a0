"""
JWT debugger service for the JWT Toolkit.
"""

from shared.base_service import BaseService
from .inspection.token_inspector import (
    TokenDecodeRequest,
    TokenEncodeRequest,
    TokenInspector,
    TokenVerificationRequest,
)


class JwtService(BaseService):
    """JWT debugger service implementation."""

    def __init__(self, **config_overrides):
        super().__init__("jwt", 8020, **config_overrides)
        self.token_inspector = TokenInspector(
            metrics=self.metrics,
            default_algorithm=self.config.default_algorithm,
            sample_lifetime=self.config.sample_token_lifetime,
        )

        self._setup_jwt_routes()

    def _setup_jwt_routes(self):
        """Set up JWT-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "jwt",
                "message": "JWT Toolkit - Debugger Service",
                "version": "1.0.0"
            }

        @self.app.post("/jwt/decode")
        async def decode_token(request: TokenDecodeRequest):
            """Decode a token and evaluate its time-based claims."""
            return self.token_inspector.decode(request)

        @self.app.post("/jwt/encode")
        async def encode_token(request: TokenEncodeRequest):
            """Sign a header and payload into a token."""
            return self.token_inspector.encode(request)

        @self.app.post("/jwt/verify")
        async def verify_token(request: TokenVerificationRequest):
            """Verify a token signature against a shared secret."""
            return self.token_inspector.verify(request)

        @self.app.get("/jwt/algorithms")
        async def list_algorithms():
            """List known algorithms and whether they can be executed."""
            return {"algorithms": self.token_inspector.algorithms()}

        @self.app.get("/jwt/sample")
        async def sample_token():
            """Sample token and default encoder inputs."""
            return self.token_inspector.sample()


def create_app(**config_overrides):
    """Create FastAPI application."""
    service = JwtService(**config_overrides)
    return service.app


if __name__ == "__main__":
    service = JwtService()
    service.run()

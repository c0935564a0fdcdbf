"""
Start the request validation API with uvicorn.

Usage:
    python serve.py

HOST, PORT and LOG_LEVEL are read from the environment (or .env).
"""

import uvicorn

from validation_api.config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Request Validation API")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print(f"   - Create User:   POST http://localhost:{settings.PORT}/users")
    print(f"   - API Docs:           http://localhost:{settings.PORT}/docs")
    print()
    print("Test with curl:")
    print(f'   curl -X POST "http://localhost:{settings.PORT}/users" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"name": "Anton Havrylov", "email": "anton@example.com"}\'')
    print()
    print("=" * 60)

    uvicorn.run(
        "validation_api.main:app",
        host=settings.HOST,
        port=settings.port_value,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower()
    )

"""Main backend file"""
# Standard imports
from contextlib import asynccontextmanager
# API services
import uvicorn
from fastapi import FastAPI
# Environments
from dotenv import load_dotenv
# Database
import jammit.services.database_services as database
# Services
from jammit.services.exception_services import register_exception_handlers
# Routers
from jammit.routers.review_router import review_router
from jammit.routers.gathering_router import gathering_router
from jammit.routers.user_router import user_router

# Load environment variables
load_dotenv('.env')


@asynccontextmanager
async def _lifespan(_fastapi_app: FastAPI):
    """Context manager for the application lifespan"""
    await database.setup()
    yield  # Wait until server shutdown
    database.client.close()


def create_app(lifespan=_lifespan) -> FastAPI:
    """Build the application with all routers and exception handlers."""
    fastapi_app = FastAPI(
        title="Jammit Backend",
        summary="Backend for the Jammit band session meetup app",
        version="0.1.0",
        lifespan=lifespan)

    register_exception_handlers(fastapi_app)

    # Include routers
    fastapi_app.include_router(review_router, prefix='/jammit/review',
                               tags=['Review'])
    fastapi_app.include_router(gathering_router, prefix='/jammit/gatherings',
                               tags=['Gathering'])
    fastapi_app.include_router(user_router, prefix='/jammit/users',
                               tags=['Users'])
    return fastapi_app


# Create app
app = create_app()


if __name__ == "__main__":
    # Run the server
    uvicorn.run("main:app", host="0.0.0.0", port=4020,
                reload=True, reload_dirs=['jammit'])

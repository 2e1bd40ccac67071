"""
Application configuration
"""
from pydantic_settings import BaseSettings

from scheme_autogen.policy.modes import BuildMode, SchemeAutogenerationMode  # type: ignore


class Settings(BaseSettings):
    """Application settings"""

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080
    API_TITLE: str = "Scheme Autogen API"
    API_VERSION: str = "0.1.0"

    # Workers
    ARTIFACTS_PATH: str = "/files/artifacts"

    # Scheme generation defaults
    DEFAULT_BUILD_MODE: BuildMode = BuildMode.XCODE
    DEFAULT_SCHEME_AUTOGENERATION_MODE: SchemeAutogenerationMode = SchemeAutogenerationMode.AUTO

    @property
    def projects_root(self) -> str:
        """Directory holding one subdirectory per project"""
        return f"{self.ARTIFACTS_PATH}/projects"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

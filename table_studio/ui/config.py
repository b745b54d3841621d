from dataclasses import dataclass
from typing import Optional

from table_studio.config import Settings
from table_studio.services.api_client import DatasetApiClient
from table_studio.services.query_service import QueryController
from table_studio.services.registry_service import DatasetRegistryClient
from table_studio.services.selection_service import DatasetSelector
from table_studio.services.state_store import ViewStateStore
from table_studio.services.upload_service import UploadController


@dataclass
class AppConfig:
    settings: Settings
    store: ViewStateStore
    api: Optional[DatasetApiClient] = None

    registry: Optional[DatasetRegistryClient] = None
    uploads: Optional[UploadController] = None
    queries: Optional[QueryController] = None
    selector: Optional[DatasetSelector] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.uploads is None:
            raise RuntimeError("AppConfig.uploads must be initialized.")
        if self.queries is None:
            raise RuntimeError("AppConfig.queries must be initialized.")
        if self.selector is None:
            raise RuntimeError("AppConfig.selector must be initialized.")

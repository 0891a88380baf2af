"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.repositories.common.cache import CacheTableManager
from app.repositories.datasets import DatasetRepository
from app.services.dashboard.service import DashboardService
from app.services.insights.service import DataInsightsService
from app.services.processing.pipeline import DataProcessor


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, start_monitoring: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.datasets = DatasetRepository()
        self.cache = CacheTableManager()
        self.cache.initialize_cache_tables()

        # Services (with injected repos)
        self.processor = DataProcessor()
        self.insights = DataInsightsService()

        self.dashboard = DashboardService(
            datasets=self.datasets,
            processor=self.processor,
            cache=self.cache,
            insights=self.insights,
        )

        self.cache.warm_up_cache(self.processor, self.datasets.collections())
        if start_monitoring:
            self.cache.start_cache_monitoring()

        self._initialized = True
        logger.info("Container initialized")

    def shutdown(self) -> None:
        """Stop background work. init() may be called again afterwards."""
        if not self._initialized:
            return
        self.cache.stop_cache_monitoring()
        self._initialized = False
        logger.info("Container shut down")


# Global container instance
container = Container()

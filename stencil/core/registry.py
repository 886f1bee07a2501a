# stencil/core/registry.py
"""
Service registry.

Backends (file system, version control, persistence gate) are created lazily
on first use and shared afterwards. Tests swap them with ``register`` and
reset the registry with ``clear``.
"""
from typing import Dict, Any, Type, Optional, Callable, TypeVar
import threading

from stencil.utils.logging import get_logger

T = TypeVar('T')


class ServiceRegistry:
    """
    Thread-safe registry of lazily created services.
    """
    
    _instance = None
    _lock = threading.RLock()
    
    @classmethod
    def get_instance(cls) -> 'ServiceRegistry':
        """Get the singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = ServiceRegistry()
        return cls._instance
    
    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._logger = get_logger(__name__)
    
    def register(self, name: str, service: Any) -> Any:
        """
        Register a service with the registry.
        
        Args:
            name: Unique identifier for the service
            service: The service instance to register
            
        Returns:
            The registered service (for method chaining)
        """
        with self._lock:
            self._services[name] = service
            self._logger.debug(f"Registered service: {name} ({type(service).__name__})")
            return service
    
    def get(self, name: str) -> Optional[Any]:
        """
        Get a service from the registry.
        
        Returns:
            The service instance or None if not found
        """
        return self._services.get(name)
    
    def get_or_create(self, name: str, factory: Callable[[], T], cls: Optional[Type[T]] = None) -> T:
        """
        Get a service or create it with ``factory`` if it doesn't exist.
        
        Args:
            name: Service name
            factory: Callable building the service
            cls: Expected type; a registered service of another type is logged
        """
        service = self.get(name)
        if service is not None:
            if cls is not None and not isinstance(service, cls):
                self._logger.warning(
                    f"Type mismatch for service '{name}': expected {cls.__name__}, "
                    f"got {type(service).__name__}"
                )
            return service
        
        with self._lock:
            if name in self._services:
                return self._services[name]
            
            self._logger.debug(f"Creating service: {name}")
            return self.register(name, factory())
    
    def clear(self) -> None:
        """Clear all registered services."""
        with self._lock:
            self._logger.debug("Clearing service registry")
            self._services.clear()


registry = ServiceRegistry.get_instance()

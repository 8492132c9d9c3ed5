from .orchestrator import BrowserOrchestrator

__all__ = ["BrowserOrchestrator"]

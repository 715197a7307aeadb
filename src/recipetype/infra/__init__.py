from .process import run_process

__all__ = ["run_process"]

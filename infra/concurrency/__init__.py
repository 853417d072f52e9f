from .synchronized_invocation_log import SynchronizedInvocationLog

__all__ = ["SynchronizedInvocationLog"]

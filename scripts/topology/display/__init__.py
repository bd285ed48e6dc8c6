"""Display topology configuration via xrandr."""

from .errors import ApplyError, QueryError, TopologyError
from .manager import ReconcileResult, TopologyConfigurator

__all__ = ['ApplyError', 'QueryError', 'TopologyError', 'ReconcileResult', 'TopologyConfigurator']

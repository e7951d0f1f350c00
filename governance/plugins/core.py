from governance.context import Context
from governance.core import ClientCore
from governance.plugins.family import PluginFamily


class PluginClientCore(ClientCore):
    """ClientCore bound to one governance plugin family."""

    family: PluginFamily

    def __init__(self, context: Context, family: PluginFamily = None):
        super().__init__(context)
        if family is not None:
            self.family = family
        if getattr(self, "family", None) is None:
            raise ValueError(f"{type(self).__name__} needs a plugin family")

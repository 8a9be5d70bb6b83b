"""
Stateless configuration mixin.

This module defines `StatelessConfigMixin`, a helper mixin for layers whose
behavior does not depend on any configurable hyperparameters.

It provides empty configuration hooks and a `copy()` that simply builds a new
instance, allowing parameter-free layers to participate uniformly in model
copying and `info()` reporting without introducing special cases.
"""

from typing import Any, Dict
from typing_extensions import Self


class StatelessConfigMixin:
    """
    Mixin providing configuration hooks for stateless layers.

    Examples include fixed activations such as `Relu` or `Softmax` which carry
    no hyperparameters and no trainable state.
    """

    def get_config(self) -> Dict[str, Any]:
        """
        Return the constructor configuration.

        For stateless layers, this method returns an empty dictionary,
        indicating that no parameters are required to reconstruct the object.

        Returns
        -------
        Dict[str, Any]
            An empty configuration dictionary.
        """
        return {}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        """
        Reconstruct the layer from a configuration dictionary.

        Since stateless layers do not require any configuration parameters,
        the provided configuration is ignored and a default instance of the
        class is returned.
        """
        return cls()

    def copy(self) -> Self:
        """
        Return a fresh instance; there is no state to carry over.
        """
        return type(self).from_config(self.get_config())

"""
Tensor control-path manager for access-mode dispatch.

This module defines the shared control-path manager used to register and
resolve access-mode-specific implementations of view and container methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"access_mode"``. Method dispatch is
therefore performed on the runtime value of ``self.access_mode``, which
follows the process-wide `AccessMode`.

Typical usage
-------------
Checked and unchecked implementations register themselves using this
manager:

    @tensor_control_path_manager(TVA, TVA._element_offset, AccessMode.CHECKED)
    def element_offset_checked(self, inds): ...

    @tensor_control_path_manager(TVA, TVA._element_offset, AccessMode.UNCHECKED)
    def element_offset_unchecked(self, inds): ...
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches tensor methods based on `self.access_mode`
tensor_control_path_manager = create_path_builder("access_mode")

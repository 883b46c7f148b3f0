"""
Array control-path manager for numeric-domain dispatch.

The manager specializes the generic `create_path_builder` utility with the
state attribute name ``"numeric_domain"``: methods registered through it are
dispatched on whether the receiving array holds real or complex elements.

Typical usage
-------------
    @narray_control_path_manager(Mixin, Mixin.op, NumericDomain.REAL)
    def op_real(self, ...): ...

    @narray_control_path_manager(Mixin, Mixin.op, NumericDomain.COMPLEX)
    def op_complex(self, ...): ...
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches NArray methods based on `self.numeric_domain`
narray_control_path_manager = create_path_builder("numeric_domain")

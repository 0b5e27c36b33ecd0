"""Service layer: operations that return :class:`ServiceResult`."""

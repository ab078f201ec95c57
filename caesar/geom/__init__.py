"""Geometry subpackage; it holds no modules."""
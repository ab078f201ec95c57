"""Mesh subpackage; it holds no modules."""
"""
CLI Commands Module

- convert: frame conversion of single positions and rotation matrices
- separation: angular distance between two positions
- frames: supported frames and conversion table
- glossary: reference frame terminology
"""

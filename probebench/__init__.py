"""Hash table collision-strategy benchmarks: linear probing, double hashing and red-black-tree chaining."""

__version__ = "0.1.0"
__all__ = ["benchmark", "dualstream", "hashing", "hashtable", "rbtree"]
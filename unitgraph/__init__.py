"""
unitgraph: module dependency graph and package publication.

Typical library use:

    from unitgraph.services.description import load_description
    from unitgraph.services.graph import BuildEvaluator

    evaluation = BuildEvaluator().evaluate(load_description("units.toml"))
    for package in evaluation.packages:
        print(package.coordinates)
"""

__version__ = "0.1.0"

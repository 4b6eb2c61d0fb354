"""
Kubesandbox - Simulated kubectl for learning

Accepts raw kubectl command strings and answers them with realistic
kubectl-style output, backed by a fixed in-memory catalog of fake
cluster resources. No real cluster is ever contacted.

Modules:
- catalog: Static resource snapshot and kind aliasing
- executor: Command parsing, dispatch and output formatting
- api: HTTP transport for the simulator
"""

__version__ = "1.0.0"

"""
Core task model for nake

- core.descriptor: Candidate unit descriptors handed over by source analysis
- core.validator: Structural checks a candidate must pass to become a task
- core.naming: Qualified name, short name and declaring type derivation
- core.task: The Task entity (dependencies, binding, invocation)
- core.dependency: Cycle detection, execution ordering, task registry
- core.execution: Error hierarchy and invocation identity
"""

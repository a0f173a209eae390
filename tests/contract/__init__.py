"""Contract tests: behavior every `Ix` implementation must honor."""

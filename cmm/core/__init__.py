# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
cmm.core: data shared across front-end stages.

Modules:
  - span: Location and offset-to-location mapping
  - diagnostics: Type A/B diagnostics built from parse errors
"""

__all__ = [
	"span",
	"diagnostics",
]

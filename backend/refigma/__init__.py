"""Refigma landing composer.

Subpackages:
- tokens: Token schema loading, token resolution and color conversion
- canvas: Scene node model and the host canvas contract (plus an in-memory host)
- builder: Section builders that assemble the landing page scene graph
- content: Content payload model and the anchor-based content application engine
- generation: Gemini client, prompt template and the generation orchestrator
"""

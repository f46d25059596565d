"""
This package contains the prompt templates used by the engine.

The templates are stored as Markdown files and loaded with
:meth:`chatbox.prompt_builder.PromptBuilder.load_prompt`.
"""

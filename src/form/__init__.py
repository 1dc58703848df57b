"""Form state and the controller that drives translation submissions."""

from src.form.controller import FormState, TranslationFormController

__all__ = ["FormState", "TranslationFormController"]

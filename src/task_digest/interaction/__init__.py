"""Two-step comment flow: open a form, merge the submitted comment back."""

"""Shell integration for rcprompt."""

"""User-friendly error message helpers.

Translates technical errors into plain language for snack bars and dialogs.
"""


def friendly_error(error: Exception, context: str = "") -> str:
    """Convert a technical error into a user-friendly message.

    Args:
        error: The exception that occurred
        context: Optional context about what operation was being attempted

    Returns:
        A user-friendly error message
    """
    msg = str(error).lower()

    # Network errors
    if "connection" in msg or "timeout" in msg or "timed out" in msg or "network" in msg:
        return "Couldn't reach the training backend. Check that it is running and the URL in Settings is correct."

    if "ssl" in msg or "certificate" in msg:
        return "Secure connection failed. Check the backend URL scheme (http vs https)."

    if "404" in msg or "not found" in msg:
        return "The requested resource wasn't found. Check the backend URL and try again."

    if "422" in msg or "unprocessable" in msg:
        return "The backend rejected the request. Check the target column and hyperparameter values."

    # File/storage errors
    if "permission denied" in msg or "access denied" in msg:
        return "Permission denied. Check folder permissions for the application database."

    if "no space" in msg or "disk full" in msg:
        return "Not enough disk space. Free up some space and try again."

    # Database errors
    if "database" in msg or "sqlite" in msg:
        return "Database error. Try restarting the app. If the problem persists, the database may be corrupted."

    # JSON errors
    if "json" in msg or "decode" in msg:
        return "Invalid data format. The backend sent a response that could not be read."

    if context:
        return f"{context} failed: {str(error)[:100]}"

    clean_msg = str(error)
    if len(clean_msg) > 150:
        clean_msg = clean_msg[:150] + "..."
    return f"Something went wrong: {clean_msg}"

from ..services.functions import invoke, FunctionError


def sync_interviewers_job():
    """Queue-friendly wrapper around the ``sync-interviewers`` function."""
    result = invoke("sync-interviewers")
    if not result.get("success"):
        raise FunctionError(result.get("error") or "Interviewer sync failed", 500)
    return result

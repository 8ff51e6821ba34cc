from formsurf.model.submission import Submission

__all__ = ["Submission"]

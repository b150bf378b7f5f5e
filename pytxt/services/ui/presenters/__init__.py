from .main_presenter import IMainView, MainPresenter, run_inline

__all__ = ["IMainView", "MainPresenter", "run_inline"]

from moca_browser.ui.shell.browser_window import BrowserWindow

__all__ = ["BrowserWindow"]

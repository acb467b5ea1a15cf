#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app epf_projection.wsgi run --port 5000 --debug

from __future__ import annotations

from epf_projection.app import create_app
from epf_projection.config import AppSettings

settings = AppSettings()
app = create_app(settings)


if __name__ == "__main__":
    app.run(port=5000, debug=settings.debug)

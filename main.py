"""Local development entrypoint.

Runs the threaded dev server so a streamed reveal does not block other
requests. Production uses ``wsgi.py``.
"""

import os

from drawbox import create_app

app = create_app()


if __name__ == "__main__":
    port = int(os.getenv("PORT", "8000"))
    app.run(host="127.0.0.1", port=port, debug=False, threaded=True)

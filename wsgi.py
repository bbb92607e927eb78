"""WSGI entrypoint for the admin dashboard.

Production:
  gunicorn -w 2 -b 0.0.0.0:8000 wsgi:app

Local:
  python wsgi.py   (binds 127.0.0.1:8000, config from APP_ENV / .env)
"""

from lottery_admin import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=app.config.get("DEBUG", False))

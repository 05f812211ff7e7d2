import os

from transporte.main import create_app, env_bool

app = create_app()

if __name__ == "__main__":
    # PORT lo fija la plataforma de despliegue; DEBUG o APP_DEBUG activan el modo debug
    app.run(
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 5000)),
        debug=env_bool("DEBUG") or env_bool("APP_DEBUG"),
    )

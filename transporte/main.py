import logging
import os

from flask import Flask

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def env_bool(nombre, defecto=False):
    valor = os.environ.get(nombre)
    if valor is None:
        return defecto
    return str(valor) in ("1", "true", "True")


def _configurar_log_errores(app):
    # app.logger se comparte entre apps con el mismo nombre: se reemplaza
    # el handler de una llamada anterior en vez de acumularlos
    for handler in list(app.logger.handlers):
        if getattr(handler, "_log_errores", False):
            app.logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(app.config["ERROR_LOG"], delay=True, encoding="utf-8")
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._log_errores = True
    app.logger.addHandler(handler)


def create_app(config=None):
    app = Flask(__name__)

    app.config["SOLO_BALANCEADOS"] = env_bool("VOGEL_SOLO_BALANCEADOS")
    app.config["MAX_DIMENSION"] = int(os.environ.get("VOGEL_MAX_DIMENSION", 50))
    app.config["ERROR_LOG"] = os.environ.get("VOGEL_ERROR_LOG", "errors.log")
    if config:
        app.config.update(config)

    _configurar_log_errores(app)

    # Importar controladores
    from transporte.controllers.resolver_controller import resolver_bp
    app.register_blueprint(resolver_bp)

    return app

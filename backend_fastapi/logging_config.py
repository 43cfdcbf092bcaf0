import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """
    Configura el logger raíz del proceso.

    Se llama al importar backend_fastapi.main, así también queda configurado
    el proceso hijo que uvicorn levanta con reload.

    Argumentos:
        level (str): Nivel de log (debug, info, warning, error).
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)

import logging

# Silence noisy third-party loggers
for logger_name in (
    "urllib3",
    "chardet",
    "charset_normalizer",
):
    logging.getLogger(logger_name).setLevel(logging.WARNING)

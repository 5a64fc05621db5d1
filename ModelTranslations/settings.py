"""
Настройки проекта ModelTranslations.

Значения окружения читаются через python-decouple (.env или переменные окружения).
"""
from pathlib import Path
from decouple import config

# Базовые пути проекта
BASE_DIR = Path(__file__).resolve().parent

# Настройки безопасности
SECRET_KEY = config('SECRET_KEY', default='model-translations-insecure-key')
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = ['localhost', '127.0.0.1']

# Список установленных приложений
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Локальные приложения
    'model_translations',
    'blog',
]

# Middleware
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# URL конфигурация
ROOT_URLCONF = 'urls'

# Настройки базы данных
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': config('DB_NAME', default=':memory:'),
    }
}

# Templates
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# Статические файлы
STATIC_URL = '/static/'

# Поле по умолчанию
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Настройки времени
USE_TZ = True
TIME_ZONE = 'UTC'

# Настройки локализации
LANGUAGE_CODE = config('LANGUAGE_CODE', default='en')
USE_I18N = True

# Поддерживаемые языки
LANGUAGES = [
    ('en', 'English'),
    ('sv', 'Swedish'),
    ('es', 'Spanish'),
]

# Переводы моделей
MODEL_TRANSLATIONS_DEFAULT_LOCALE = config('MODEL_TRANSLATIONS_DEFAULT_LOCALE', default=LANGUAGE_CODE)
MODEL_TRANSLATIONS_FALLBACK_TO_ANY = config('MODEL_TRANSLATIONS_FALLBACK_TO_ANY', default=True, cast=bool)

# Логирование
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': True,
        },
        'model_translations': {
            'handlers': ['console'],
            'level': config('MODEL_TRANSLATIONS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}

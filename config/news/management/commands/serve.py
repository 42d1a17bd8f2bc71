"""
Management command: Run the news server on all interfaces.

Binds ``0.0.0.0`` on ``settings.PORT`` (``PORT`` env var, default 3000),
prints the URLs of the site and its API endpoints, then hands over to
Django's ``runserver``.

Usage:
    python manage.py serve
    python manage.py serve --port 8080 --reload
"""

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

HOST = '0.0.0.0'


class Command(BaseCommand):
    help = 'Run the BBC News App server on all network interfaces.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to listen on (defaults to the PORT setting).',
        )
        parser.add_argument(
            '--reload',
            action='store_true',
            default=False,
            help='Restart the server when source files change.',
        )

    def handle(self, *args, **options):
        port = options['port'] or settings.PORT
        if not 0 < port < 65536:
            raise CommandError(f'Invalid port: {port}')

        base_url = f'http://{HOST}:{port}'
        self.stdout.write(self.style.SUCCESS(f'🚀 BBC News App server running on {base_url}'))
        self.stdout.write(f'📊 Health check available at {base_url}/api/health')
        self.stdout.write(f'📰 News API available at {base_url}/api/news')

        call_command(
            'runserver',
            f'{HOST}:{port}',
            use_reloader=options['reload'],
        )

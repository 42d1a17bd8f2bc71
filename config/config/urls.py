"""
URL configuration for the BBC News App project.

The news app owns every route, including the catch-all that serves the
public directory, so it is mounted at the root.
"""

from django.urls import include, path

urlpatterns = [
    path('', include('news.urls')),
]

handler404 = 'news.views.not_found'
handler500 = 'news.views.server_error'

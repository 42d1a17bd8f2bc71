from django.urls import path, re_path

from . import views

app_name = 'news'

urlpatterns = [
    path('', views.public_file, name='index'),
    re_path(r'^api/news/?$', views.article_list, name='article-list'),
    re_path(r'^api/news/(?P<article_id>[^/]+)/?$', views.article_detail, name='article-detail'),
    re_path(r'^api/health/?$', views.health, name='health'),
    # Must stay last: anything else is either a public file or a 404.
    re_path(r'^(?P<path>.+)$', views.public_file, name='public-file'),
]

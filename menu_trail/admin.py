from django.contrib import admin

from .models import Menu, MenuLink, PathAlias


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ('name', 'title')
    search_fields = ('name', 'title')


@admin.register(MenuLink)
class MenuLinkAdmin(admin.ModelAdmin):
    list_display = ('title', 'menu', 'link_id', 'url', 'route_name', 'parent', 'weight', 'enabled', 'language')
    list_filter = ('menu', 'enabled', 'language')
    search_fields = ('title', 'link_id', 'url', 'route_name')


@admin.register(PathAlias)
class PathAliasAdmin(admin.ModelAdmin):
    list_display = ('alias', 'path', 'language')
    list_filter = ('language',)
    search_fields = ('alias', 'path')

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Menu',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.SlugField(max_length=64, unique=True)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='PathAlias',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('path', models.CharField(db_index=True, max_length=2048)),
                ('alias', models.CharField(db_index=True, max_length=2048)),
                ('language', models.CharField(blank=True, db_index=True, max_length=16)),
            ],
            options={
                'ordering': ['id'],
                'verbose_name_plural': 'path aliases',
            },
        ),
        migrations.CreateModel(
            name='MenuLink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('link_id', models.CharField(max_length=255, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('url', models.CharField(blank=True, max_length=2048)),
                ('route_name', models.CharField(blank=True, max_length=255)),
                ('parent', models.CharField(blank=True, db_index=True, max_length=255)),
                ('weight', models.IntegerField(default=0)),
                ('enabled', models.BooleanField(default=True)),
                ('language', models.CharField(blank=True, db_index=True, max_length=16)),
                ('menu', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='links', to='menu_trail.menu')),
            ],
            options={
                'ordering': ['menu', 'weight', 'title', 'link_id'],
            },
        ),
    ]

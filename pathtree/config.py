# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from traitlets import Enum, Integer, HasTraits, TraitError, validate
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import set_pathtree_log_level


CONFIG_BASENAME = 'pathtree_config'

merge_strategies = ('fieldwise', 'replace-on-new-key')


class PathtreeConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def reset_config():
    """Drop all cached configurable instances, restoring trait defaults."""
    _config_cache.clear()


def default_config_path():
    return [os.getcwd(), os.path.expanduser(os.path.join('~', '.pathtree'))]


def iter_config_files(path):
    """Yield the config objects found on `path`, lowest priority first.

    `path` lists directories in descending priority, so the last
    directory is read first and later files override earlier ones.
    """
    if not isinstance(path, list):
        path = [path]
    for directory in reversed(path):
        try:
            config = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory).load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Update the nested dict `target` in place with the items of `new`.

    Unless include_none is set, a None value deletes its key, and
    sections left empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            section = target.setdefault(key, {})
            recursive_update(section, value, include_none)
            if not section and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def read_disk_config(path=None):
    """Merge all pathtree config files found on `path` into one dict."""
    merged = {}
    for config in iter_config_files(default_config_path() if path is None else path):
        recursive_update(merged, config, False)
    return merged


def build_config(section, path=None, include_none=False):
    """Return the settings of one config section as a dict.

    Trait defaults (or values already set on the shared instance)
    come first, then whatever the config files on `path` say.
    """
    try:
        cls = section_configurables[section]
    except KeyError:
        raise ValueError('Unknown config section %r, expected one of %s.' % (
            section, ', '.join(sorted(section_configurables)))) from None

    config = dict(config_instance(cls).configured_traits(cls))
    recursive_update(config, read_disk_config(path).get(cls.__name__, {}), include_none)
    return config


def load_config(path=None):
    """Apply config files found on `path` to the shared configurable instances.

    Values are validated by the traits, so a bad value in a config
    file raises a TraitError here rather than at first use.
    """
    for section, cls in section_configurables.items():
        instance = config_instance(cls)
        for name, value in build_config(section, path=path).items():
            setattr(instance, name, value)
    set_pathtree_log_level(config_instance(Global).log_level, set_main=False)


class Global(PathtreeConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Traversal(PathtreeConfigurable):

    max_depth = Integer(
        1000,
        help="Maximum nesting depth walked before giving up with TooDeep.",
    ).tag(config=True)

    @validate('max_depth')
    def _valid_max_depth(self, proposal):
        if proposal['value'] < 1:
            raise TraitError('max_depth needs to be at least 1')
        return proposal['value']


class Merging(PathtreeConfigurable):

    strategy = Enum(
        merge_strategies,
        'fieldwise',
        help="How two branches under the same top-level key are combined.",
    ).tag(config=True)


section_configurables = {
    'global': Global,
    'traversal': Traversal,
    'merging': Merging,
}

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.sequences import legal_diff_sequence_algorithms
from .log import LOG_LEVELS


class SnakediffConfigurable(HasTraits):

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


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('snakediff_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, SnakediffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(SnakediffConfigurable):

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Sequences(Global):

    mode = Enum(
        ('chars', 'lines'),
        'chars',
        help="Diff the inputs as sequences of characters or of lines.",
    ).tag(config=True)


class Diff(_Sequences):

    algorithm = Enum(
        legal_diff_sequence_algorithms,
        'wavefront',
        help="Specify the edit script algorithm to use.",
    ).tag(config=True)

    ignore_case = Bool(
        False,
        help="Compare elements ignoring case.",
    ).tag(config=True)

    trace = Bool(
        False,
        help="Print every intermediate state while replaying the edit script.",
    ).tag(config=True)

    use_color = Bool(
        True,
        help="Use ANSI colors in the replay trace.",
    ).tag(config=True)


class Patch(_Sequences):
    pass


class SDiff(Diff):
    pass

class SPatch(Patch):
    pass


entrypoint_configurables = {
    'snakediff-diff': SDiff,
    'snakediff-patch': SPatch,
}

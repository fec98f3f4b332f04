# -*- coding: utf-8 -*-
# @File   : logger.py

from pathlib import Path
import pandas as pd
import yaml

from abc import ABCMeta, abstractmethod
from collections import defaultdict


class GenericLogger(metaclass=ABCMeta):

    def __init__(self, root, project_name, experiment_name, params=None):
        self.root = Path(root)
        self.project_name = project_name
        self.experiment_name = experiment_name
        self.params = params or dict()

    @abstractmethod
    def log_statistics(self, name, statistics):
        pass

    @abstractmethod
    def log_text(self, text, timestamp=None, **kwargs):
        raise NotImplementedError()

    @abstractmethod
    def save(self):
        raise NotImplementedError()

    def stop(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, trace):
        self.save()
        self.stop()


class MultiLogger(GenericLogger):
    """Fans every call out to several loggers."""

    def __init__(self, loggers):
        self._loggers = dict(loggers)
        if not self._loggers:
            raise ValueError('MultiLogger needs at least one logger.')

        first = next(iter(self._loggers.values()))
        super(MultiLogger, self).__init__(first.root, first.project_name,
                                          first.experiment_name, first.params)

    def log_statistics(self, name, statistics):
        for logger_name, logger in self._loggers.items():
            logger.log_statistics(name, statistics)

    def log_text(self, text, timestamp=None, **kwargs):
        for logger_name, logger in self._loggers.items():
            logger.log_text(text, timestamp=timestamp, **kwargs)

    def save(self):
        for logger_name, logger in self._loggers.items():
            logger.save()

    def stop(self):
        for logger_name, logger in self._loggers.items():
            logger.stop()


class LocalLogger(GenericLogger):
    """Writes fitted statistics as csv under root/projects/<project>/<experiment>."""

    def __init__(self, root, project_name, experiment_name, params=None):
        super(LocalLogger, self).__init__(root, project_name, experiment_name,
                                          params)

        self.experiment_fpath = self.root.absolute() / 'projects' / \
            project_name / experiment_name

        try:
            self.experiment_fpath.mkdir(parents=True)
        except FileExistsError:
            if 'debug' == project_name or self.params.get('resume', False):
                pass
            else:
                raise FileExistsError(
                    f"Did you change experiment name? : {self.experiment_fpath}"
                )

        # save params
        with open(self.experiment_fpath / 'params.yaml', 'w') as file:
            yaml.dump(dict(self.params),
                      file,
                      default_flow_style=False,
                      sort_keys=False)

        self.container = {
            'statistics': defaultdict(list),
            'text': list(),
        }
        self._fit_counter = defaultdict(int)

    def log_statistics(self, name, statistics):
        frame = statistics.to_frame()
        frame.index.name = 'feature'
        frame.insert(0, 'fit', self._fit_counter[name])
        self._fit_counter[name] += 1
        self.container['statistics'][name].append(frame)

    def log_text(self, text, timestamp=None, **kwargs):
        self.container['text'].append({
            'text': text,
            **kwargs, 'timestamp': timestamp
        })

    def save(self):
        for ckey, cval in self.container.items():
            tpath = (self.experiment_fpath / ckey)
            if cval:
                tpath.mkdir(parents=True, exist_ok=True)

            if ckey == 'statistics':  # cval: dict[name] -> [DataFrame]
                for name, frames in cval.items():
                    write_path = tpath / f'{name}.csv'
                    mode, header = ('a', False) if write_path.exists() else ('w', True) # yapf:disable

                    pd.concat(frames).to_csv(write_path,
                                             mode=mode,
                                             header=header)

                # reset container
                self.container['statistics'] = defaultdict(list)

            if ckey == 'text':
                if cval:  # if it has any element
                    pd.DataFrame(cval).to_csv(tpath / "text.csv", index=False)

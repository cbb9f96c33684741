#!/usr/bin/env python

import logging
import os

import yaml

logger = logging.getLogger(__name__)


def get_yaml_file(file_name, directory='', type='r', must_exist=True):
    """
    Loads a yaml file
    :param file_name:  if it is not an absolute path it is relative to directory
    :param directory:  '' means the package directory, None the current one
    :param type:       open mode
    :param must_exist: if False, a missing file returns {}
    :return: the file content as a dict
    """
    if not file_name:
        raise ValueError('No file name given')
    full_file_name = full_path(file_name, directory)

    try:
        with open(full_file_name, type) as yml_file:
            logger.debug('Loading %s ...', full_file_name)
            cfg = yaml.safe_load(yml_file)
    except IOError:
        if must_exist:
            raise FileNotFoundError('File %s not found' % full_file_name)
        cfg = {}
    return cfg if cfg is not None else {}


def full_path(file_name, directory=''):
    if os.path.isabs(file_name):
        return file_name
    if directory is None:
        script_dir = ''
    elif directory == '':
        script_dir = os.path.dirname(__file__) + '/'  # <-- absolute dir the script is in
    else:
        script_dir = directory + '/'
    return script_dir + file_name


def file_name_without_extension(file_name):
    """
    Returns the file name without the extension
    :param file_name:
    :return:
    """
    return os.path.splitext(file_name)[0] if file_name is not None else None


def get_file_name_with_other_extension(file_path, ext='yaml'):
    """
    Same file, other extension, ex: /a/view_graph.py -> /a/view_graph.yaml
    """
    dir_name      = os.path.dirname(os.path.abspath(file_path))
    base_name     = file_name_without_extension(os.path.basename(file_path))
    new_file_name = '%s/%s.%s' % (dir_name, base_name, ext)
    return new_file_name

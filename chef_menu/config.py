"""Runtime configuration defaults for roles, navigation and logging."""

from __future__ import annotations

import os

CHEF_ROLE_VALUE = "christoffel"
VIEWER_ROLE_VALUE = "user"

# Navigation routes.
LOGIN_ROUTE = "login"
HOME_ROUTE = "home"
ADD_ROUTE = "add"
REMOVE_ROUTE = "remove"
FILTER_ROUTE = "filter"

# Named string parameters carried between screens.
PARAM_ROLE = "role"
PARAM_DISHES = "dishes"
PARAM_NEW_DISH = "newDish"

CURRENCY_PREFIX = "R"
WELL_KNOWN_COURSES = ("Starter", "Main", "Dessert")

LOG_PATH_ENV = "CHEF_MENU_LOG_PATH"
LOG_LEVEL_ENV = "CHEF_MENU_LOG_LEVEL"
DEBUG_LOG_PATH = os.environ.get(LOG_PATH_ENV, "/tmp/chef-menu-debug.log")
LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper()

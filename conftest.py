# The modules of this project live at the top of the repository; having
# this file here puts that directory on sys.path when pytest runs.

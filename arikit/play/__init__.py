"""Namespace for playback helpers; it holds no modules yet."""
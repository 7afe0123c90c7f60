"""tmux format variable names.

One constant per variable from the FORMATS section of tmux(1). Entity modules
build their request lists from these names; nothing here is mutated at runtime.

Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#FORMATS
"""

ACTIVE_WINDOW_INDEX = "active_window_index"
ALTERNATE_ON = "alternate_on"
ALTERNATE_SAVED_X = "alternate_saved_x"
ALTERNATE_SAVED_Y = "alternate_saved_y"
BUFFER_CREATED = "buffer_created"
BUFFER_NAME = "buffer_name"
BUFFER_SAMPLE = "buffer_sample"
BUFFER_SIZE = "buffer_size"
CLIENT_ACTIVITY = "client_activity"
CLIENT_CELL_HEIGHT = "client_cell_height"
CLIENT_CELL_WIDTH = "client_cell_width"
CLIENT_CONTROL_MODE = "client_control_mode"
CLIENT_CREATED = "client_created"
CLIENT_DISCARDED = "client_discarded"
CLIENT_FLAGS = "client_flags"
CLIENT_HEIGHT = "client_height"
CLIENT_KEY_TABLE = "client_key_table"
CLIENT_LAST_SESSION = "client_last_session"
CLIENT_NAME = "client_name"
CLIENT_PID = "client_pid"
CLIENT_PREFIX = "client_prefix"
CLIENT_READONLY = "client_readonly"
CLIENT_SESSION = "client_session"
CLIENT_TERMFEATURES = "client_termfeatures"
CLIENT_TERMNAME = "client_termname"
CLIENT_TERMTYPE = "client_termtype"
CLIENT_TTY = "client_tty"
CLIENT_UID = "client_uid"
CLIENT_USER = "client_user"
CLIENT_UTF8 = "client_utf8"
CLIENT_WIDTH = "client_width"
CLIENT_WRITTEN = "client_written"
COMMAND = "command"
COMMAND_LIST_ALIAS = "command_list_alias"
COMMAND_LIST_NAME = "command_list_name"
COMMAND_LIST_USAGE = "command_list_usage"
CONFIG_FILES = "config_files"
COPY_CURSOR_LINE = "copy_cursor_line"
COPY_CURSOR_WORD = "copy_cursor_word"
COPY_CURSOR_X = "copy_cursor_x"
COPY_CURSOR_Y = "copy_cursor_y"
CURRENT_FILE = "current_file"
CURSOR_CHARACTER = "cursor_character"
CURSOR_FLAG = "cursor_flag"
CURSOR_X = "cursor_x"
CURSOR_Y = "cursor_y"
HISTORY_BYTES = "history_bytes"
HISTORY_LIMIT = "history_limit"
HISTORY_SIZE = "history_size"
HOOK = "hook"
HOOK_CLIENT = "hook_client"
HOOK_PANE = "hook_pane"
HOOK_SESSION = "hook_session"
HOOK_SESSION_NAME = "hook_session_name"
HOOK_WINDOW = "hook_window"
HOOK_WINDOW_NAME = "hook_window_name"
HOST = "host"
HOST_SHORT = "host_short"
INSERT_FLAG = "insert_flag"
KEYPAD_CURSOR_FLAG = "keypad_cursor_flag"
KEYPAD_FLAG = "keypad_flag"
LAST_WINDOW_INDEX = "last_window_index"
LINE = "line"
MOUSE_ALL_FLAG = "mouse_all_flag"
MOUSE_ANY_FLAG = "mouse_any_flag"
MOUSE_BUTTON_FLAG = "mouse_button_flag"
MOUSE_HYPERLINK = "mouse_hyperlink"
MOUSE_LINE = "mouse_line"
MOUSE_SGR_FLAG = "mouse_sgr_flag"
MOUSE_STANDARD_FLAG = "mouse_standard_flag"
MOUSE_STATUS_LINE = "mouse_status_line"
MOUSE_STATUS_RANGE = "mouse_status_range"
MOUSE_UTF8_FLAG = "mouse_utf8_flag"
MOUSE_WORD = "mouse_word"
MOUSE_X = "mouse_x"
MOUSE_Y = "mouse_y"
NEXT_SESSION_ID = "next_session_id"
ORIGIN_FLAG = "origin_flag"
PANE_ACTIVE = "pane_active"
PANE_AT_BOTTOM = "pane_at_bottom"
PANE_AT_LEFT = "pane_at_left"
PANE_AT_RIGHT = "pane_at_right"
PANE_AT_TOP = "pane_at_top"
PANE_BG = "pane_bg"
PANE_BOTTOM = "pane_bottom"
PANE_CURRENT_COMMAND = "pane_current_command"
PANE_CURRENT_PATH = "pane_current_path"
PANE_DEAD = "pane_dead"
PANE_DEAD_SIGNAL = "pane_dead_signal"
PANE_DEAD_STATUS = "pane_dead_status"
PANE_DEAD_TIME = "pane_dead_time"
PANE_FG = "pane_fg"
PANE_FORMAT = "pane_format"
PANE_HEIGHT = "pane_height"
PANE_ID = "pane_id"
PANE_IN_MODE = "pane_in_mode"
PANE_INDEX = "pane_index"
PANE_INPUT_OFF = "pane_input_off"
PANE_LAST = "pane_last"
PANE_LEFT = "pane_left"
PANE_MARKED = "pane_marked"
PANE_MARKED_SET = "pane_marked_set"
PANE_MODE = "pane_mode"
PANE_PATH = "pane_path"
PANE_PID = "pane_pid"
PANE_PIPE = "pane_pipe"
PANE_RIGHT = "pane_right"
PANE_SEARCH_STRING = "pane_search_string"
PANE_START_COMMAND = "pane_start_command"
PANE_START_PATH = "pane_start_path"
PANE_SYNCHRONIZED = "pane_synchronized"
PANE_TABS = "pane_tabs"
PANE_TITLE = "pane_title"
PANE_TOP = "pane_top"
PANE_TTY = "pane_tty"
PANE_UNSEEN_CHANGES = "pane_unseen_changes"
PANE_WIDTH = "pane_width"
PID = "pid"
RECTANGLE_TOGGLE = "rectangle_toggle"
SCROLL_POSITION = "scroll_position"
SCROLL_REGION_LOWER = "scroll_region_lower"
SCROLL_REGION_UPPER = "scroll_region_upper"
SEARCH_MATCH = "search_match"
SEARCH_PRESENT = "search_present"
SELECTION_ACTIVE = "selection_active"
SELECTION_END_X = "selection_end_x"
SELECTION_END_Y = "selection_end_y"
SELECTION_PRESENT = "selection_present"
SELECTION_START_X = "selection_start_x"
SELECTION_START_Y = "selection_start_y"
SERVER_SESSIONS = "server_sessions"
SESSION_ACTIVITY = "session_activity"
SESSION_ALERTS = "session_alerts"
SESSION_ATTACHED = "session_attached"
SESSION_ATTACHED_LIST = "session_attached_list"
SESSION_CREATED = "session_created"
SESSION_FORMAT = "session_format"
SESSION_GROUP = "session_group"
SESSION_GROUP_ATTACHED = "session_group_attached"
SESSION_GROUP_ATTACHED_LIST = "session_group_attached_list"
SESSION_GROUP_LIST = "session_group_list"
SESSION_GROUP_MANY_ATTACHED = "session_group_many_attached"
SESSION_GROUP_SIZE = "session_group_size"
SESSION_GROUPED = "session_grouped"
SESSION_ID = "session_id"
SESSION_LAST_ATTACHED = "session_last_attached"
SESSION_MANY_ATTACHED = "session_many_attached"
SESSION_MARKED = "session_marked"
SESSION_NAME = "session_name"
SESSION_PATH = "session_path"
SESSION_STACK = "session_stack"
SESSION_WINDOWS = "session_windows"
SOCKET_PATH = "socket_path"
START_TIME = "start_time"
UID = "uid"
USER = "user"
VERSION = "version"
WINDOW_ACTIVE = "window_active"
WINDOW_ACTIVE_CLIENTS = "window_active_clients"
WINDOW_ACTIVE_CLIENTS_LIST = "window_active_clients_list"
WINDOW_ACTIVE_SESSIONS = "window_active_sessions"
WINDOW_ACTIVE_SESSIONS_LIST = "window_active_sessions_list"
WINDOW_ACTIVITY = "window_activity"
WINDOW_ACTIVITY_FLAG = "window_activity_flag"
WINDOW_BELL_FLAG = "window_bell_flag"
WINDOW_BIGGER = "window_bigger"
WINDOW_CELL_HEIGHT = "window_cell_height"
WINDOW_CELL_WIDTH = "window_cell_width"
WINDOW_END_FLAG = "window_end_flag"
WINDOW_FLAGS = "window_flags"
WINDOW_FORMAT = "window_format"
WINDOW_HEIGHT = "window_height"
WINDOW_ID = "window_id"
WINDOW_INDEX = "window_index"
WINDOW_LAST_FLAG = "window_last_flag"
WINDOW_LAYOUT = "window_layout"
WINDOW_LINKED = "window_linked"
WINDOW_LINKED_SESSIONS = "window_linked_sessions"
WINDOW_LINKED_SESSIONS_LIST = "window_linked_sessions_list"
WINDOW_MARKED_FLAG = "window_marked_flag"
WINDOW_NAME = "window_name"
WINDOW_OFFSET_X = "window_offset_x"
WINDOW_OFFSET_Y = "window_offset_y"
WINDOW_PANES = "window_panes"
WINDOW_RAW_FLAGS = "window_raw_flags"
WINDOW_SILENCE_FLAG = "window_silence_flag"
WINDOW_STACK_INDEX = "window_stack_index"
WINDOW_START_FLAG = "window_start_flag"
WINDOW_VISIBLE_LAYOUT = "window_visible_layout"
WINDOW_WIDTH = "window_width"
WINDOW_ZOOMED_FLAG = "window_zoomed_flag"
WRAP_FLAG = "wrap_flag"

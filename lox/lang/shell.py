"""Handles interactive/command-line mode for the lox interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lox interpreter shell."""
    intro = "lox interpreter :: Python backend\nType 'help' for more information, 'exit' or Ctrl-D to quit."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def parseline(self, line):
        """Only a bare word ('exit', 'help') is a shell command. Anything longer is lox, even 'exit = 5;'."""
        command, arg, line = super().parseline(line)
        if arg:
            return None, None, line
        return command, arg, line

    def default(self, line):
        """Runs one line of lox. Errors on this line don't carry over to the next one."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            try:
                self.sess.run(line)
            finally:
                self.sess.error_handler.reset(runtime=True)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lox interpreter!\n\n"
              "Statements end with ';'. Try 'var greeting = \"hello\";' and then \n"
              "'print greeting + \" world\";'. Variables stay defined until you exit, \n"
              "and '{ ... }' opens a block with its own scope.",
              file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

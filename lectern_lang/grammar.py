LECTERN_GRAMMAR = r"""
    start: statement*

    // --- Lessons (Statements) ---
    statement: "print" expr ";"                                      -> print_stmt
             | "let" NAME "=" expr ";"                               -> let
             | "raise" expr? ";"                                     -> raise_stmt
             | "try" block "catch" NAME block finally_clause? "end"  -> guarded
             | "exit" NUMBER? ";"                                    -> exit_stmt
             | expr ";"                                              -> expr_stmt

    block: "{" statement* "}"                                        -> block
    finally_clause: "finally" block

    ?expr: sum
    ?sum: call
        | sum "+" call -> concat

    ?call: atom
         | NAME "(" args? ")" -> call

    args: expr ("," expr)*

    ?atom: STRING -> string
         | NAME   -> var
         | "(" expr ")"

    NAME: /[a-zA-Z_]\w*/
    STRING: /"(\\.|[^"\\\n])*"/
    NUMBER: /\d+/

    %import common.WS
    %ignore WS
    %ignore /#.*/
"""

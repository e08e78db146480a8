TEXCALC_GRAMMAR = r"""
    // --- ENTRY POINTS ---
    program: _NL* (statement _NL+)* "EOF"
    line: _NL* statement _NL*
    formula: _NL* expression _NL*

    // --- STATEMENTS (top level only) ---
    // Declaration heads are ordinary expressions; the builder decides which
    // of the three declaration shapes (if any) the head has.
    ?statement: expression
              | expression EQUALS expression          -> declaration

    // --- PRECEDENCE TIERS (loosest first, all left-associative) ---
    ?expression: sum

    ?sum: product
        | sum "+" product                             -> addition
        | sum "-" product                             -> subtraction

    ?product: power
            | product "*" power                       -> multiplication
            | product "/" power                       -> division

    ?power: indexed
          | power "^" indexed                         -> exponentiation

    // At most one suffix, touching its base.
    ?indexed: primary
            | primary _INDEX expression "}"           -> index

    ?primary: "(" expression ")"                      -> group
            | call
            | variable
            | number
            | vector
            | symbolic

    call: CALLEE "(" expression ")"
    variable: identifier
    number: NUMBER
    vector: "(" expression ("," expression)+ ")"

    ?identifier: SCALAR
               | vector_ident
    vector_ident: _VEC "{" SCALAR "}"

    // Control sequences reach the parser already resolved to an arity class.
    // The summand of a sum extends as far right as it can.
    ?symbolic: UNARY_OP _operand                      -> single_arity
             | BINARY_OP _operand _operand            -> double_arity
             | TERNARY_OP _operand _operand _operand  -> triple_arity
             | SUM_OP "{" identifier EQUALS expression "}" "^" "{" expression "}" expression -> summation

    _operand: "{" expression "}"

    NUMBER: /\d+(\.\d+)?/
    CALLEE.2: /[a-z](?=\()/
    SCALAR: /[a-z]/
    CONTROL: /\\[a-z][A-Za-z0-9_]*/
    EQUALS: "="
    _INDEX: /(?<![ \t\r])_\{/
    _NL: /\n/

    %declare _VEC UNARY_OP BINARY_OP TERNARY_OP SUM_OP

    %ignore /[ \t\r]+/
"""

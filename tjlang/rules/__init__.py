"""Static analysis rules, one module per check, run by the analyzer."""